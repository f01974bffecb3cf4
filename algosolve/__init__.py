"""Solutions to classic competitive-programming problems, one function per problem."""

__version__ = "0.1.0"