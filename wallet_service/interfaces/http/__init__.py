"""HTTP interface: routers and dependencies."""
