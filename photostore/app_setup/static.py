"""
Montage des fichiers statiques.
Expose:
- /static -> tout le répertoire public (css, js)
- /tiny -> vignettes des photos référencées par le catalogue
"""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from photostore.config import PUBLIC_DIR


def mount_static_files(app: FastAPI) -> None:
    app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")
    app.mount("/tiny", StaticFiles(directory=str(PUBLIC_DIR / "tiny"), check_dir=False), name="tiny")
