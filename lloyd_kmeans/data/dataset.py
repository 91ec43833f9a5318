"""
Загрузка наборов точек для кластеризации из текстовых файлов.

Формат совпадает с тем, что пишет scripts/generate_datasets.py.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class Dataset:
    """
    Набор точек, прочитанный из текстового файла.

    Формат файла:
    # Метаданные в JSON (необязательная строка-комментарий)
    # Центроиды (K строк: метка + координаты), если в метаданных есть K
    # Данные (N строк: метка + координаты)
    """

    def __init__(self, data_path: str | Path) -> None:
        """
        Args:
            data_path: Путь к файлу датасета
        """
        self.data_path = Path(data_path)
        self.metadata: dict[str, Any] = {}
        self.X: np.ndarray | None = None
        self.labels_true: np.ndarray | None = None
        self.initial_centroids: np.ndarray | None = None

        logger.info(f"Loading dataset from {self.data_path}")
        self._load_data()

    def _parse_metadata(self, line: str) -> None:
        """Первая строка-комментарий может содержать JSON с метаданными."""
        if self.metadata:
            return
        body = line.lstrip("#").strip()
        if not body.startswith("{"):
            return
        try:
            self.metadata = json.loads(body)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed metadata line in {self.data_path}")

    def _load_data(self) -> None:
        """
        Читает файл построчно.

        Пустые строки и комментарии пропускаются. Если метаданные задают K,
        первые K строк с метками 0..K-1 считаются центроидами.

        Raises:
            ValueError: Если строка не разбирается в числа или файл пуст
        """
        centroids: list[np.ndarray] = []
        points: list[np.ndarray] = []
        labels: list[int] = []

        with open(self.data_path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                if line.startswith("#"):
                    self._parse_metadata(line)
                    continue

                parts = line.split()
                if len(parts) < 2:
                    raise ValueError(
                        f"{self.data_path}:{lineno}: expected a label and coordinates"
                    )

                label = int(parts[0])
                values = np.array(parts[1:], dtype=np.float64)

                K = self.metadata.get("K")
                if K is not None and len(centroids) < K and not points and label < K:
                    centroids.append(values)
                else:
                    points.append(values)
                    labels.append(label)

        if not points:
            raise ValueError(f"{self.data_path}: no data points found")

        self.X = np.vstack(points)
        self.labels_true = np.array(labels, dtype=np.int32)
        self.initial_centroids = np.vstack(centroids) if centroids else None

        logger.info(
            f"Dataset loaded: X.shape={self.X.shape}, "
            f"initial_centroids="
            f"{None if self.initial_centroids is None else self.initial_centroids.shape}"
        )

    @property
    def K(self) -> int | None:
        """Число кластеров из метаданных, если оно указано."""
        return self.metadata.get("K")
