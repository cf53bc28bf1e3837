"""View-models: UI-valmiit rakenteet API-datasta."""
