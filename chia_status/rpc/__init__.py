"""Per-service mutual-TLS RPC clients, reachability probe and response decoders."""
