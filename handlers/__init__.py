"""
handlers/ - Presentation Layer
================================
Interactive role menus. Each handler reads its arguments from the terminal,
delegates to the appropriate Service, and prints the result.
No business logic lives here.
"""
