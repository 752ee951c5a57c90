"""
Color Family Engine - Colors Module

Provides color space conversions, white balance compensation, perceptual
color difference and family classification for catalog colors.
"""

__version__ = "1.0.0"
