"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate requests before any store mutation and map records to
response schemas. They are constructed with their repositories injected.
"""
