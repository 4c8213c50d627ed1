"""
Asana Tools Package

All tools in this directory are auto-discovered by registry.py.
Each tool inherits from AsanaTool (tools/_common.py) and implements
name, description, parameters and execute().
"""

# Tools are auto-discovered, no explicit imports needed
