"""
Вспомогательные скрипты проекта lloyd-kmeans.

Модули:
- generate_datasets: генерация синтетических датасетов
"""
