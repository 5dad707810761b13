"""passkit_template.core — Foundation layer.

Contains the error taxonomy, colour validation, the field table, shared
result types, .env loading and the report formatter.
This module has NO dependencies on passkit_template.template or the
image/pass collaborators. Only stdlib is allowed here.
"""
