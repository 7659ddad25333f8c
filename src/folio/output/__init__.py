"""Output layer — turn ServiceResult into text for humans or machines."""
