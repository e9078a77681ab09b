"""
Serializers for the Palaver API.
"""
