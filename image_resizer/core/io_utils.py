import os
from typing import Iterable, List, Optional

SUPPORTED_EXTS = {".jpg",".jpeg",".png",".webp",".bmp",".tiff"}

def is_supported(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in SUPPORTED_EXTS

def list_images(folder: str) -> List[str]:
    out: List[str] = []
    for root, _, files in os.walk(folder):
        for n in files:
            if is_supported(n):
                out.append(os.path.join(root, n))
    return sorted(out)

def gather_inputs(files: Iterable[str], folder: Optional[str]) -> List[str]:
    """Explicit files win over a folder; unsupported files are dropped."""
    files = list(files or [])
    if files:
        return [f for f in files if is_supported(f)]
    if folder:
        return list_images(folder)
    return []
