"""
Questions app

The sticky-note board of a class session: student submissions, instructor
triage (answered / important), single deletes and board clears.
"""
