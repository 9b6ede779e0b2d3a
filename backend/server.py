"""
Yelele Gestion - API Facturation
Montants en toutes lettres, formatage FCFA, contenu des factures

Démarre avec:
    uvicorn server:app --host 0.0.0.0 --port 8001 --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import APP_NAME, APP_VERSION, CORS_ORIGINS, LOG_LEVEL

# Configuration logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("yelele")

# Créer l'app
app = FastAPI(
    title=APP_NAME,
    description="Montants en lettres et contenu des factures (Francs CFA)",
    version=APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==================== IMPORT DES ROUTES ====================

from routes import montants, invoices, commandes

# Routes avec préfixe /api
app.include_router(montants.router, prefix="/api")
app.include_router(invoices.router, prefix="/api")
app.include_router(commandes.router, prefix="/api")

# ==================== ROUTE RACINE ====================

@app.get("/")
async def root():
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs"
    }


# ==================== STARTUP ====================

@app.on_event("startup")
async def startup():
    logger.info(f"🚀 {APP_NAME} v{APP_VERSION} démarré")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
