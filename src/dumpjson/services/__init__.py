"""Service layer: serializer, deserializer, fallbacks, and the addon facade."""
