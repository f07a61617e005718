"""Rock-Paper-Scissors-Lizard-Spock elimination tournament."""
