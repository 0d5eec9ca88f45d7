from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError


def pillow_dpi(image_path: Union[str, Path]) -> Optional[Tuple[float, float]]:
    """
    Return the (x, y) DPI Pillow reports for an image, or None if it has none.

    Used to cross-check the metadata parser against Pillow's own decoders.
    """
    try:
        with Image.open(image_path) as img:
            dpi = img.info.get("dpi")
    except (UnidentifiedImageError, OSError):
        return None
    if isinstance(dpi, tuple) and len(dpi) == 2:
        return float(dpi[0]), float(dpi[1])
    return None
