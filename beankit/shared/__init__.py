"""
Shared Layer

Cross-cutting helpers and configuration used by callers of the library.

Contains:
    - config: Constants and environment settings
    - utils: Bean, date/time and string utilities
"""
