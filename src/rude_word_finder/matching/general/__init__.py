"""
general.
=======

Shared general-purpose modules used by the matching driver: token
normalization, the fragment pool / decomposition search, vocabulary
loading, and config/log utilities.
"""
