"""
athost - AT Protocol identity host

Key Components:
- identity: Parsing, validation and resolution of AT Protocol DIDs
"""
