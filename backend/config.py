"""
Configuration partagée (chargée depuis .env)
"""

import os
from dotenv import load_dotenv
from pathlib import Path

# Charger .env
ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

# Application
APP_NAME = os.environ.get('APP_NAME', 'Yelele Gestion - API Facturation')
APP_VERSION = os.environ.get('APP_VERSION', '1.0.0')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# CORS (liste séparée par des virgules)
CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]


# ==================== DEVISE ====================

CURRENCY_CONFIG = {
    "code": os.environ.get('CURRENCY_CODE', 'XAF'),
    "symbol": os.environ.get('CURRENCY_SYMBOL', 'FCFA'),
    "name": os.environ.get('CURRENCY_NAME', 'Franc CFA'),
    "locale": os.environ.get('CURRENCY_LOCALE', 'fr-CM'),
    "decimals": int(os.environ.get('CURRENCY_DECIMALS', '0')),
}

# Phrase légale en pied de facture
AMOUNT_WORDS_TEMPLATE = os.environ.get(
    'AMOUNT_WORDS_TEMPLATE',
    'Arrêtée à la somme de {montant} Francs CFA.'
)


# ==================== SOCIÉTÉ ÉMETTRICE ====================

COMPANY = {
    "name": os.environ.get('COMPANY_NAME', 'YELELE DIGIT MARK SARL'),
    "address": os.environ.get('COMPANY_ADDRESS', '12498 Bonabéri, Face DK Hotel'),
    "city": os.environ.get('COMPANY_CITY', 'Douala, Cameroun'),
    "phone": os.environ.get('COMPANY_PHONE', '+237 652 15 76 57'),
    "email": os.environ.get('COMPANY_EMAIL', 'yeleledigitmark@yahoo.fr'),
    "niu": os.environ.get('COMPANY_NIU', 'M032118534812X'),
    "rccm": os.environ.get('COMPANY_RCCM', 'RC/DLA/2021/B/1417'),
}

BANK_DETAILS = {
    "holder": os.environ.get('BANK_HOLDER', COMPANY["name"]),
    "account_number": os.environ.get('BANK_ACCOUNT_NUMBER', '00271578301'),
    "branch_code": os.environ.get('BANK_BRANCH_CODE', '10035'),
    "bank_code": os.environ.get('BANK_CODE', '10039'),
}
