"""
Core: error taxonomy, command values, ports, application state and the dispatcher.
"""
