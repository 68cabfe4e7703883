"""
Controllers: adapt request input to service calls and shape the response envelope
"""
