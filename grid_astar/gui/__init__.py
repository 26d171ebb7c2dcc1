"""pygame front end for editing and searching a grid."""
