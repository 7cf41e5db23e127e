"""Flask front end for the word-rank index (see frontend.web)."""
