# Key whose handlers run on every emission, receiving (type, payload)
WILDCARD = "*"
