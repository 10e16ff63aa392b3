"""GameRental: rental-order management core over a relational store."""
