import sys
from typing import Optional, TextIO, Tuple

from src.config.settings import settings
from src.users.domain.user import User
from src.users.logging.structured_repository_logger import StructuredRepositoryLogger, configure_logging
from src.users.services.repository_factory import RepositoryBackend, build_user_repository
from src.users.services.sequential_user_id_source import SequentialUserIdSource
from src.users.services.user_drift_detector import detect_user_drift
from src.users.store.logging_user_repository import LoggingUserRepository


def run_demo(
    name: Optional[str] = None,
    out: Optional[TextIO] = None,
    logger: Optional[StructuredRepositoryLogger] = None,
) -> Tuple[Optional[User], Optional[User]]:
    """
    Save the same user into a map-backed and a list-backed repository and
    print what each returns for id 1.
    """
    if name is None:
        name = settings.DEMO_USER_NAME
    out = out or sys.stdout
    logger = logger or StructuredRepositoryLogger()

    repo1 = LoggingUserRepository(build_user_repository(RepositoryBackend.MAP), logger, "map")
    repo2 = LoggingUserRepository(build_user_repository(RepositoryBackend.LIST), logger, "list")

    seq = SequentialUserIdSource()

    repo1.save(User(seq.new_id(), name))
    repo2.save(User(seq.current(), name))

    map_result = repo1.find_by_id(1)
    list_result = repo2.find_by_id(1)
    print(f"MAP:  {map_result}", file=out)
    print(f"LIST: {list_result}", file=out)

    report = detect_user_drift(repo1, repo2)
    logger.emit("demo_drift_check", clean=report.clean, left_count=report.left_count, right_count=report.right_count)
    return map_result, list_result


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    logger = StructuredRepositoryLogger()
    backend = RepositoryBackend.parse(settings.USER_REPOSITORY_BACKEND)
    logger.emit("demo_started", configured_backend=backend.value)

    run_demo(logger=logger)

    # The configured backend gets the same treatment through the factory.
    configured = build_user_repository(backend)
    configured.save(User(1, settings.DEMO_USER_NAME))
    print(f"{backend.value.upper()} (configured): {configured.find_by_id(1)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
