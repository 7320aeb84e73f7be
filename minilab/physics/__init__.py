"""2D physics sandbox of circular bodies under gravity."""