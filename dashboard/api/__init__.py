"""
HTTP blueprints for the Invoice Dashboard
"""
