"""
BrightPath wellness service.
"""
