"""
Analytics app package for the classroom Q&A board.

Keeps per-session question counts (total / answered / unanswered /
important) so an instructor still sees how a class went after the board
has been cleared or the session has ended.
"""
