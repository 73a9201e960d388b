"""Problem contracts, exceptions and logging shared by every search strategy."""
