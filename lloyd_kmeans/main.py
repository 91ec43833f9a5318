# main.py
import argparse
import json
import logging
import sys

from lloyd_kmeans.api import ClusterizeConfig, clusterize
from lloyd_kmeans.data.dataset import Dataset
from lloyd_kmeans.errors import InvalidInputError
from lloyd_kmeans.utils.logging import format_run_prefix, setup_logger

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lloyd-kmeans",
        description="Кластеризация точек из текстового файла алгоритмом Ллойда.",
    )
    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Путь к файлу датасета (строки: метка + координаты).",
    )
    parser.add_argument(
        "--k",
        type=int,
        default=None,
        help="Количество кластеров; по умолчанию берётся K из метаданных файла.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Максимальное число итераций (по умолчанию без ограничения).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed генератора случайных центроидов для воспроизводимости.",
    )
    parser.add_argument(
        "--use-file-centroids",
        action="store_true",
        help="Стартовать с центроидов, записанных в файле датасета.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Уровень логирования (сообщения пишутся в stderr).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger = setup_logger(getattr(logging, args.log_level), stream=sys.stderr)

    dataset = Dataset(args.data)
    k = args.k if args.k is not None else dataset.K

    centroids = None
    if args.use_file_centroids:
        if dataset.initial_centroids is None:
            logger.error(f"No centroids found in {args.data}")
            return EXIT_INVALID_INPUT
        centroids = dataset.initial_centroids

    config = ClusterizeConfig(
        data=dataset.X,
        k=k,
        limit=args.limit,
        centroids=centroids,
    )

    prefix = format_run_prefix(
        {"N": dataset.X.shape[0], "D": dataset.X.shape[1], "K": k, "limit": args.limit}
    )
    logger.info(f"{prefix} Clusterizing {args.data}")

    try:
        result = clusterize(config, rng=args.seed, logger=logger)
    except InvalidInputError as e:
        logger.error(f"{prefix} Invalid input: {e}")
        return EXIT_INVALID_INPUT

    logger.info(
        f"{prefix} Finished after {result.iterations} iterations, "
        f"totalDistance={result.total_distance:.0f}"
    )

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
