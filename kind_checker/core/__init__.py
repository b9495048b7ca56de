"""kind_checker.core — Foundation layer.

Contains the sentinel and enum types, the runtime type / internal tag
mapping, the shared regular-grammar fragments and environment config.
This module has NO dependencies on kind_checker.formats or kind_checker.registry.
Only stdlib and numpy are allowed here.
"""
