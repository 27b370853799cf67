"""
Configuration du logging de Comptoir via loguru.

Trois destinations, toutes pilotées par Settings :
- Console : lisible, colorée, au niveau COMPTOIR_LOG_LEVEL
- Fichier applicatif : JSON avec rotation, tous niveaux
- Journal d'audit : une ligne par changement d'état de commande ou de stock
  (messages émis via un logger lié avec ``audit=True``)
"""

import sys

from loguru import logger

from src.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

AUDIT_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZZ} | {message}"


def _is_audit(record) -> bool:
    return record["extra"].get("audit", False)


def configure_logging(settings: Settings) -> None:
    """Remplace les handlers loguru par ceux décrits dans les settings.

    Args :
        settings : Configuration de l'application (niveaux, chemins, rotation)
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",  # Mouvements de stock en DEBUG
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    settings.audit_log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.audit_log_file,
        level="INFO",
        format=AUDIT_FORMAT,
        filter=_is_audit,
        enqueue=True,
    )

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        audit_log_file=str(settings.audit_log_file),
    )
