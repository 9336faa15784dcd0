"""Domain layer: entidades, value objects e regras de negócio"""
