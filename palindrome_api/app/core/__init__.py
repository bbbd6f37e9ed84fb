"""Configuration, logging, error handling and the palindrome classifier."""
