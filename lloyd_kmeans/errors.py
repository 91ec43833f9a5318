class InvalidInputError(ValueError):
    """Входные данные не прошли проверку перед запуском кластеризации."""
