# Federal breach disclosure sources
