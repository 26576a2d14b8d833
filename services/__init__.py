"""
services/ - Business Logic Layer
=================================
Services sit between the menus and the repositories. They turn query results
into printable tables or messages and turn database errors into an error
message, so the menu loop always continues.
"""
