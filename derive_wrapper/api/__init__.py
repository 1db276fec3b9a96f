"""
Derive engine: directive resolution, delegate selection and capability
generators. Entry points live in ``derive_wrapper.api.generator``.
"""
