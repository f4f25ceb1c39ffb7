"""Result models returned by the aggregator and served by the API."""
