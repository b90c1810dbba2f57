from .contact import Contact, ContactCreate, ContactUpdate

__all__ = ['Contact', 'ContactCreate', 'ContactUpdate']
