"""Final prompt composition."""
