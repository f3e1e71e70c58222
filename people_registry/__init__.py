"""People Registry — 사람/국가 CRUD 서비스.

People Registry — CRUD service for persons and the countries they belong to.
"""
