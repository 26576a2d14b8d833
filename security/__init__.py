"""
security/ - Authorization
==========================
Guards applied to the role menus.
"""
