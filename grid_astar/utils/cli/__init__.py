"""Development command line for editing and searching a grid."""
