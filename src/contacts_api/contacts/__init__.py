from contacts_api.contacts.models import Contact

__all__ = ["Contact"]
