"""Service layer — checkout operations returning ServiceResult."""
