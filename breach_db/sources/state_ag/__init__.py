# State Attorney General breach disclosure sources
