"""Trainee attendance package.

Feature modules (attendance, sections, users, work_window) each hold their
domain model, a repository Protocol, and a MySQL implementation; services
depend only on the Protocols.
"""
