"""
Services Layer

Business rules for members, donations and site content:
- Accept plain values or input models, never HTTP request objects
- Talk to storage only through the store protocols in ``lilian.repositories``
- Signal expected failures with the exceptions in ``lilian.services.errors``
"""
