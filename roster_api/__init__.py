"""
Roster admin API.

A small FastAPI service behind the roster admin tool: password check,
player CRUD over a DynamoDB table, image uploads to S3 and a settings
document holding the client app's feature flags.
"""
