"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Earth model, rounding precision, coordinate bounds
- exceptions: Custom exception hierarchy
- geometry: Area and centroid calculation for polygon rings
- validation: GeoJSON coordinate validation and boundary parsing
- ingress: Request-body deserialisation
"""
