"""
Classes app

Owns the time-boxed class sessions an instructor opens for a lecture:
- access code generation
- session creation, lookup by code, deletion
- the derived active/ended state
"""
