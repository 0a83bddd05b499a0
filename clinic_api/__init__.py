"""In-memory clinic booking API: doctors, patients and appointments."""

__version__ = "1.0.0"
