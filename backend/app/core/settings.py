import os

DEFAULT_QUOTATION_TERMS = """1. Prices are valid for 30 days from the date of quotation
2. Payment terms: 50% advance, 50% upon completion
3. Delivery: 4-6 weeks from order confirmation
4. Installation to be carried out during normal working hours
5. Any additional civil or structural work not included
6. Prices exclude site mobilization and demobilization
7. All materials are as per approved specifications"""


class Settings:
    def __init__(self):
        self.app_name = "Crystal Line Quotations"
        self.api_version = "1.0.0"
        self.environment = os.getenv("APP_ENV", "development")
        self.secret_key = os.getenv("SECRET_KEY", "CHANGE_ME")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./quotations.db")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_json = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")

        # Company block printed at the top of exported quotations
        self.company_name = os.getenv("COMPANY_NAME", "Crystal Line Glass & Aluminum")
        self.company_address = os.getenv("COMPANY_ADDRESS", "Dubai, UAE")
        self.company_phone = os.getenv("COMPANY_PHONE", "+971-XX-XXXXXXX")
        self.company_email = os.getenv("COMPANY_EMAIL", "info@crystalline.ae")
        self.currency = "AED"

        # Fallbacks used when the settings table has no value for a key
        self.default_vat_percentage = "5"
        self.default_quotation_prefix = "CRY"
        self.default_quotation_terms = DEFAULT_QUOTATION_TERMS
        self.quotation_number_retries = 3


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
