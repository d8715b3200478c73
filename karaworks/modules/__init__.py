"""Domain modules: users, events, applications, wallets and payouts."""
