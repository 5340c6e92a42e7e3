"""Local scratch directories for raw and processed videos."""

import asyncio
from pathlib import Path

from video_processor.config import ScratchConfig
from video_processor.domain import ScratchRole
from video_processor.exceptions import ScratchIOError
from video_processor.logging import setup_logging

logger = setup_logging()


class LocalScratch:
    """Owns the raw and processed scratch directories on local disk."""

    def __init__(self, config: ScratchConfig):
        self._directories = {
            ScratchRole.RAW: Path(config.raw_path),
            ScratchRole.PROCESSED: Path(config.processed_path),
        }

    def ensure_scratch_space(self) -> None:
        """Creates both scratch directories (and parents) if they are missing."""
        for directory in self._directories.values():
            if directory.is_dir():
                continue
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.exception(
                    "Scratch directory creation failed",
                    extra={"directory": str(directory)},
                )
                raise ScratchIOError(str(directory), e) from e
            logger.info("Directory created", extra={"directory": str(directory)})

    def path_for(self, role: ScratchRole, file_name: str) -> Path:
        return self._directories[role] / file_name

    async def delete(self, role: ScratchRole, file_name: str) -> None:
        """
        Deletes a scratch file if it exists.

        A missing file is not an error.

        Raises:
            ScratchIOError: If the file exists but cannot be removed.
        """
        await asyncio.to_thread(self._delete_sync, self.path_for(role, file_name))

    def _delete_sync(self, path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("File not found, skipping the delete", extra={"path": str(path)})
            return
        except OSError as e:
            logger.exception("Failed to delete file", extra={"path": str(path)})
            raise ScratchIOError(str(path), e) from e
        logger.info("File deleted", extra={"path": str(path)})
