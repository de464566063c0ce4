"""InHand — Indian salaried income tax and in-hand salary calculator."""
