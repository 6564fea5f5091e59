"""
passgen - policy-driven random password generation.
"""
