"""Infrastructure modules for the Localiser.

- i18n: Translation table loading, active language and text resolution
- operations: Result type and status enum
"""
