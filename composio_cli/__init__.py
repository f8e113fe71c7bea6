"""
composio-cli - command-line access to Composio toolkits, tools and connections.
"""

__version__ = "0.1.0"
