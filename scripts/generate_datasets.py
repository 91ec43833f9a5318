"""
Генератор синтетических датасетов для ручной проверки кластеризации.

Создаёт хорошо разделённые облака точек с целочисленным масштабом
координат, чтобы округление вниз не стирало структуру кластеров.
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
from sklearn.datasets import make_blobs


@dataclass
class DatasetConfig:
    """Конфигурация параметров датасета."""

    N: int
    D: int
    K: int
    cluster_std: float = 25.0
    seed_offset: int = 0
    center_box_range: tuple[float, float] = (0.0, 1000.0)


class DatasetGenerator:
    """
    Генератор датасетов на основе sklearn.make_blobs.

    Сохраняет данные в текстовом формате, который читает
    lloyd_kmeans.data.Dataset.
    """

    def __init__(self, base_seed: int = 42, datasets_dir: str | Path = "datasets") -> None:
        """
        Args:
            base_seed: Базовое значение seed для воспроизводимости
            datasets_dir: Каталог для сохранения файлов
        """
        self.base_seed = base_seed
        self.datasets_dir = Path(datasets_dir)
        self.datasets_dir.mkdir(parents=True, exist_ok=True)

    def generate_blobs_dataset(
        self, config: DatasetConfig
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Returns:
            Кортеж (data, labels, centers):
            - data: массив данных (N x D), координаты округлены вниз
            - labels: метки кластеров (N,)
            - centers: центры кластеров (K x D), округлены вниз
        """
        seed = self.base_seed + config.seed_offset
        print(
            f"Генерация: N={config.N:,}, D={config.D}, K={config.K}, "
            f"cluster_std={config.cluster_std:.2f}, seed={seed}"
        )

        data, labels, centers = make_blobs(
            n_samples=config.N,
            n_features=config.D,
            centers=config.K,
            cluster_std=config.cluster_std,
            center_box=config.center_box_range,
            random_state=seed,
            return_centers=True,
        )
        return np.floor(data), labels, np.floor(centers)

    def save_dataset_txt(
        self,
        data: np.ndarray,
        labels: np.ndarray,
        centers: np.ndarray,
        filepath: Path,
        metadata: dict[str, Any],
    ) -> None:
        """
        Формат файла:
        # Метаданные в формате JSON
        # Центроиды (K строк, D+1 колонок: метка + координаты)
        # Данные (N строк, D+1 колонок: метка + координаты)
        """
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("# " + json.dumps(metadata, ensure_ascii=False) + "\n")
            for idx, center in enumerate(centers):
                f.write(f"{idx} " + " ".join(f"{v:.0f}" for v in center) + "\n")
            f.write("\n")
            for label, point in zip(labels, data):
                f.write(f"{int(label)} " + " ".join(f"{v:.0f}" for v in point) + "\n")

    def generate(self, config: DatasetConfig) -> Path:
        data, labels, centers = self.generate_blobs_dataset(config)
        metadata = {
            "N": config.N,
            "D": config.D,
            "K": config.K,
            "cluster_std": config.cluster_std,
            "center_box_range": list(config.center_box_range),
            "generated": time.strftime("%Y-%m-%d %H:%M:%S"),
            "seed": self.base_seed + config.seed_offset,
        }
        filepath = self.datasets_dir / f"blobs_N{config.N}_D{config.D}_K{config.K}.txt"
        self.save_dataset_txt(data, labels, centers, filepath, metadata)
        print(f"   Сохранено: {filepath}")
        return filepath


def main() -> None:
    parser = argparse.ArgumentParser(description="Генерация датасетов для lloyd-kmeans")
    parser.add_argument("--n", type=int, default=300, help="Количество точек")
    parser.add_argument("--d", type=int, default=2, help="Размерность")
    parser.add_argument("--k", type=int, default=3, help="Количество кластеров")
    parser.add_argument("--seed", type=int, default=42, help="Базовый seed")
    parser.add_argument("--out", type=str, default="datasets", help="Каталог вывода")
    args = parser.parse_args()

    generator = DatasetGenerator(base_seed=args.seed, datasets_dir=args.out)
    generator.generate(DatasetConfig(N=args.n, D=args.d, K=args.k))


if __name__ == "__main__":
    main()
