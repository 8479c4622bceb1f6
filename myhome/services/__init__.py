"""
Service layer. Every public operation runs in one ``UnitOfWork`` and returns
pydantic records, ``None`` or ``bool``; only authentication raises.
"""
