"""Follow domain module.

Directed follow edges between users ("follower follows following").
At most one edge per ordered pair; self-follow is not rejected.
"""
