from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from container + optionally from .env
    model_config = SettingsConfigDict(
        env_file=(".env",),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="storefront_gst", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    # GST defaults for product / order records that lack them
    DEFAULT_GST_PERCENTAGE: float = Field(
        default=18.0,
        validation_alias=AliasChoices("DEFAULT_GST_PERCENTAGE", "default_gst_percentage"),
    )
    DEFAULT_HSN_CODE: str = Field(default="1234", validation_alias=AliasChoices("DEFAULT_HSN_CODE", "default_hsn_code"))
    DEFAULT_UNIT: str = Field(default="PCS", validation_alias=AliasChoices("DEFAULT_UNIT", "default_unit"))

    # Seller's home state (CGST+SGST when the shipping address matches)
    HOME_STATE_NAME: str = Field(default="Karnataka", validation_alias=AliasChoices("HOME_STATE_NAME", "home_state_name"))
    HOME_STATE_KEYWORDS: list[str] = Field(
        default_factory=lambda: ["karnataka", "bengaluru", "bangalore"],
        validation_alias=AliasChoices("HOME_STATE_KEYWORDS", "home_state_keywords"),
    )

    # Display
    CURRENCY_SYMBOL: str = Field(default="₹", validation_alias=AliasChoices("CURRENCY_SYMBOL", "currency_symbol"))


settings = Settings()
