"""HTTP entry points: Flask app and serverless handler."""
