import os
import uuid
from pathlib import Path
import logging
from io import BytesIO
from PIL import Image, UnidentifiedImageError

from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)

class CoverStorage:
    def __init__(self, base_dir: str | None = None, max_height: int = 500):
        """Store book covers on local disk.

        Args:
            base_dir: Root directory for covers, defaults to the COVERS_DIR
                      environment variable or ``data/covers``
            max_height: Covers taller than this are scaled down
        """
        self.base_dir = Path(base_dir or os.getenv("COVERS_DIR", "data/covers"))
        self.max_height = max_height

    def _create_directory(self, owner_id: int) -> Path:
        directory = self.base_dir / "users" / str(owner_id)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def _process_image(self, image_data: bytes) -> bytes:
        """Decode the upload and re-encode it as a JPEG no taller than ``max_height``.

        Raises:
            InvalidInput: If the bytes are not a readable image
        """
        try:
            img = Image.open(BytesIO(image_data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidInput(f"Cover is not a valid image: {e}")

        # JPEG has no alpha channel or palette
        if img.mode != 'RGB':
            img = img.convert('RGB')

        if img.height > self.max_height:
            ratio = self.max_height / img.height
            new_width = max(1, int(img.width * ratio))
            img = img.resize((new_width, self.max_height), Image.Resampling.LANCZOS)

        output = BytesIO()
        img.save(output, format='JPEG', quality=85, optimize=True)
        return output.getvalue()

    def save_cover(self, owner_id: int, image_data: bytes) -> str:
        """Save a cover for a book owned by ``owner_id`` and return its path."""
        if not image_data:
            raise InvalidInput("Cover upload is empty")

        processed_image = self._process_image(image_data)
        file_path = self._create_directory(owner_id) / f"{uuid.uuid4().hex}.jpg"
        with open(file_path, 'wb') as f:
            f.write(processed_image)

        logger.info(f"Saved cover {file_path} ({len(processed_image)} bytes)")
        return str(file_path)


def read_cover(file_path: str | None) -> bytes | None:
    """Read a stored cover back, None when there is none or it went missing."""
    if not file_path:
        return None
    try:
        return Path(file_path).read_bytes()
    except FileNotFoundError:
        logger.warning(f"Cover file missing: {file_path}")
        return None
