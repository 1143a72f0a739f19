"""Core building blocks shared by the Bookcase server and client."""
