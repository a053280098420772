"""Configuration and logging shared by the geofield package."""
