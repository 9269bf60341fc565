"""
Users app

Instructor accounts and JWT login.  Students never sign in: they join a
class with its access code and post anonymously or under a free-text name.
"""
