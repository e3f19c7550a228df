"""Navigation bounded context.

Owns the sidebar tree of the suite: its typed model, structural
validation, role filtering and the HTTP routes serving it.
"""
