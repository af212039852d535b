"""Request/response schemas for the Person API."""

from .person import MessageResponseDTO, PersonDTO, PhoneDTO

__all__ = ["MessageResponseDTO", "PersonDTO", "PhoneDTO"]
