"""Engine — repository bootstrap planning and execution."""
