"""Pure core: decoders, identifier parsing, inspector tree and transitions."""
