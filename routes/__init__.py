"""
Flask blueprints for the page window demo app.
"""
