"""
Color Family Engine Configuration
Manages environment variables and defaults for the classification engine.
"""
import os


class Config:
    """Configuration class for the color family engine."""
    
    # Logging
    LOG_LEVEL: str = os.environ.get("COLORFAMILY_LOG_LEVEL", "INFO")
    
    # ΔE00 below which two catalog colors are reported as a conflict
    DELTA_E_THRESHOLD: float = float(os.environ.get("COLORFAMILY_DELTA_E_THRESHOLD", "2.0"))
    
    # Family used by SKU generation when neither name nor color resolves one
    FALLBACK_FAMILY: str = os.environ.get("COLORFAMILY_FALLBACK_FAMILY", "Outros")
    
    # Zero-padding of the SKU sequence (VM001)
    SKU_DIGITS: int = int(os.environ.get("COLORFAMILY_SKU_DIGITS", "3"))
    
    @classmethod
    def validate_delta_threshold(cls, threshold: float) -> bool:
        """Validate ΔE00 conflict threshold."""
        return 0.0 < threshold <= 100.0
    
    @classmethod
    def validate_hue_angle(cls, degrees: float) -> bool:
        """Validate a hue sector boundary in degrees."""
        return 0.0 <= degrees < 360.0
    
    @classmethod
    def validate_sku_digits(cls, digits: int) -> bool:
        """Validate SKU sequence padding."""
        return 1 <= digits <= 8


# Global config instance
config = Config()
