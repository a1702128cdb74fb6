#------------------------------------------------------------
#                      readme_service.py
#              Persists the rendered profile document.

import os

# This function does save README text to the given path.
# It creates the parent directory and overwrites the target file.
def save_readme(path: str, content: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file_handle:
        file_handle.write(content)
