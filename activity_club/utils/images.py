from typing import Optional

IMAGE_DIR = "images"
PLACEHOLDER_IMAGE = f"{IMAGE_DIR}/placeholder.jpg"


def image_src(image_name: Optional[str]) -> str:
    if not image_name:
        return PLACEHOLDER_IMAGE
    return f"{IMAGE_DIR}/{image_name}"
