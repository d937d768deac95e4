"""HTTP routers for the token registry."""
