"""Hello-world Flask responder deployed to GKE behind a LoadBalancer."""
