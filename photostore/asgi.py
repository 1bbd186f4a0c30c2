"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `photostore.asgi:app`.
- Toute la configuration FastAPI (routes, middlewares, static...) est centralisée
  dans photostore.app_setup.factory; ce fichier ne fait qu'exposer l'instance `app`.
"""

from photostore.app_setup.factory import create_app

app = create_app()

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "photostore.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "3000")),
        reload=True,
    )
