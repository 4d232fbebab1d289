"""Diversity & Inclusion Audit package.

Organized by feature modules (employees, audits, metrics, ...) with a thin
console layer on top of the service/repository layers.
"""
