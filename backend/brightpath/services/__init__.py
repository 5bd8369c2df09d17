"""
Services Module

Business operations behind the routers:
- accounts: signup, credential checks, server-side sessions
- wellness: mood/journal/confession/feedback entries and admin aggregation
"""
