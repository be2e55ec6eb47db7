"""
Concrete implementations of the ``loadconfig.api`` interfaces.
"""
