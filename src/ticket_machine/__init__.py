"""Railway ticket vending machine with an admin back office and special offers."""
