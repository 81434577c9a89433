"""
HTTP API for the Image Manipulation Service
"""
