"""Model catalogue, request and message types, stream events and token estimates."""